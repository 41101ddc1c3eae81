# -*- coding: utf-8 -*-
"""
Маршруты заданий.
"""
