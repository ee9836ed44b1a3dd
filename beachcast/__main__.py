import sys

from beachcast.cli import main

sys.exit(main())
