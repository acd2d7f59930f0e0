import sys

from git_tools.cli import main

sys.exit(main())
