"""Introductory programming exercises, one module per chapter (3 to 7)."""