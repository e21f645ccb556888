import sys

from newsapi_lite.reader import main

sys.exit(main())
