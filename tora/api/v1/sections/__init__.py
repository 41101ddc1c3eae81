# -*- coding: utf-8 -*-
"""
Маршруты разделов.
"""
