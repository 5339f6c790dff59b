import matplotlib

# Tests never open plot windows
matplotlib.use("Agg")
