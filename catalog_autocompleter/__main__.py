import sys

from catalog_autocompleter.cli import main

sys.exit(main())
