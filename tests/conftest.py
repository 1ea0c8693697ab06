import matplotlib

# Tests render off-screen
matplotlib.use("Agg")
