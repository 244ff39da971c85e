"""BizTime Application Package - companies, invoices and industries over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
