"""
Root pytest configuration.

Points Django at the project settings before any DRF module is imported
and keeps the language-model enhancer switched off so tests never reach
the network.
"""

import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "partsform.settings")
os.environ["PARTS_LLM_ENABLED"] = "false"

django.setup()
