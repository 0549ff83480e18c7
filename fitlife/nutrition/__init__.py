# -*- coding: utf-8 -*-
"""Nutrition domain (food logging and daily totals)."""
