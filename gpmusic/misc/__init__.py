# gpmusic/misc/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Miscellaneous utility modules for gpmusic.

plotutils is not imported here so that matplotlib is only loaded
when figures are requested: ``import gpmusic.misc.plotutils``.
"""
