import sys

from drone_survey.app import main

sys.exit(main())
