import sys

from aviation_wx.cli import main

sys.exit(main())
