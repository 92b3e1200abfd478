import sys

from kraken_rest.presentation.cli import main

sys.exit(main())
