import sys

from zip_bench.cli import main

sys.exit(main())
