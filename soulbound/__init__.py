"""Soulbound — items that do not survive being dropped or their owner's death"""
