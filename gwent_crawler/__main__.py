import sys

from gwent_crawler.cli import main

sys.exit(main())
