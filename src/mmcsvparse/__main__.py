"""Allow ``python -m mmcsvparse``."""

from mmcsvparse.cli.main import main

main()
