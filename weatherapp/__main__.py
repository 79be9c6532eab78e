import sys

from weatherapp.cli import main

sys.exit(main())
