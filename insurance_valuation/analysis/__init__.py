"""
Analysis tools built on the valuation engine.

Modules:
  sensitivity: 2D sensitivity tables over two input assumptions
  batch_valuation: Value many policies and export the results
"""
