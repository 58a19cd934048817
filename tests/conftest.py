import matplotlib

# Plots are drawn without a display during tests
matplotlib.use("Agg")
