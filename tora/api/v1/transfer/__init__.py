# -*- coding: utf-8 -*-
"""
Маршруты импорта и экспорта.
"""
