import sys

from git_stack.cli.main import main

sys.exit(main())
