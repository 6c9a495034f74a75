import sys

from bprog.repl import main

sys.exit(main())
