"""
Domain Layer - Pure Business Logic

This layer contains:
- Entities: Invoices with validated rates, costs and derived totals
- Events: Synchronous field-change notifications
- Services: Financial formulas and non-raising input validation

No external dependencies allowed in this layer.
"""
