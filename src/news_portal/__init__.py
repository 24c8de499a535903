"""Multilingual article classification and category listing for the news portal"""
