"""GastroMed: practice-management API for a gastroenterology clinic.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
