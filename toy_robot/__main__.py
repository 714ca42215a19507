import sys

from toy_robot.cli import main

sys.exit(main())
