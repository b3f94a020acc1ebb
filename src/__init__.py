"""
Rokomari Book Scraper

Modules:
    models      - Data models (BookRecord)
    common      - Shared utilities (config loader, logging, constants)
    extraction  - Page fetching, field extraction and specifications
"""
