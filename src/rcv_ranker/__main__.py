import sys

from rcv_ranker.cli import main

sys.exit(main())
