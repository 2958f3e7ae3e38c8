import sys

from dfa_validators.cli import main

sys.exit(main())
