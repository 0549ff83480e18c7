# -*- coding: utf-8 -*-
"""Summary service: store reads composed with metrics computation."""
