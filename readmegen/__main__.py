import sys

from readmegen.cli import main

sys.exit(main())
