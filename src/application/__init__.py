"""
Application Layer - Use Cases and Orchestration

This layer contains:
- Configuration: Tax rates and logging settings, loaded from env or YAML
- Services: Invoice creation, summaries and payment quotes

Depends on domain layer, orchestrates business logic.
"""
