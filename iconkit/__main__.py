import sys

from iconkit.main import main

sys.exit(main())
