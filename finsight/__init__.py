"""FinSight personal finance tracker."""
