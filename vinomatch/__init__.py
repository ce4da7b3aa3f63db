"""Wine preference matching, taste quiz and menu reconciliation service."""
