# -*- coding: utf-8 -*-
"""
Маршруты учебных программ.
"""
