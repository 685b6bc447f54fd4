import sys

from viper.app import main

sys.exit(main())
