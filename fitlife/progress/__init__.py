# -*- coding: utf-8 -*-
"""Progress domain (body measurements, BMI snapshots, period summaries)."""
