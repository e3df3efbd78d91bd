from linreg.visualization.plot import plot_linear_model

__all__ = ["plot_linear_model"]
