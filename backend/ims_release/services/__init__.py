"""
Services Package
Release lifecycle, page rules, archives and storage
"""
