# -*- coding: utf-8 -*-
"""FitLife: personal fitness tracking API (nutrition, workouts, body progress)."""

__version__ = "1.0.0"
