"""
Borno - Bilingual Student Dictionary

A small Bengali/English dictionary with a local word collection,
favorites, recent-search history and AI-assisted entry authoring.
"""

__version__ = "2.2.0"
__author__ = "Borno Contributors"
