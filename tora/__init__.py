# -*- coding: utf-8 -*-
"""
Tora: учет прохождения учебных программ.
"""

__version__ = "0.1.0"
