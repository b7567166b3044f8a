import sys

from oqa_jobfilter.main import main

sys.exit(main())
