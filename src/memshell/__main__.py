import sys

from memshell.cli import main

sys.exit(main())
