"""HTTP routers mounted by ``readmegen.main``."""
