# -*- coding: utf-8 -*-
"""Workouts domain (exercise session logging and per-day volume)."""
