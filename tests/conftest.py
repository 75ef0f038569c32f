import matplotlib

# Preview tests run without a display
matplotlib.use("Agg")
