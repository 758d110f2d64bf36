import sys

from renime.cli import main

sys.exit(main())
