import sys

from .local_runner import main

sys.exit(main())
