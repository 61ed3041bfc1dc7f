#!/usr/bin/env python3

# Copyright (C) 2022 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"__init__ module for the weierstrass package."

import logging as _logging

name = "weierstrass"
__version__ = "2022.6.1"
__author__ = "The weierstrass developers"
__author_email__ = "devs@weierstrass.dev"
__copyright__ = "Copyright (C) 2022 The weierstrass developers"
__license__ = "MIT License"

# library logging stays silent unless the application configures it
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
