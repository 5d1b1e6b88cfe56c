import sys

from gdrivecheck.cli import main

sys.exit(main())
