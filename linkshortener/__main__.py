import sys

from linkshortener.cli import main


sys.exit(main())
