import sys

from wallet_watcher.cli import main

sys.exit(main())
