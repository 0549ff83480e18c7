# -*- coding: utf-8 -*-
"""Users: registration, login, profile and bearer-token identity."""
