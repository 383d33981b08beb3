import sys

from linkshortener.cli.app import main


sys.exit(main())
