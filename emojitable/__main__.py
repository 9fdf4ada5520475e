# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

import sys

from emojitable.cli import main

sys.exit(main())
