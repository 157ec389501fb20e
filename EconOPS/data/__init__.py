# EconOPS/data/__init__.py
"""
Catalogues JSON (production, marché) et paramètres de partie (`settings.py`).
"""
