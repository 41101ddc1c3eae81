# -*- coding: utf-8 -*-
"""
API версии 1.
"""
