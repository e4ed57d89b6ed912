import sys

from turtle_reader.cli import main

sys.exit(main())
