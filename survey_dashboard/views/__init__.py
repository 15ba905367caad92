from .bar_chart_view import AveragePurchaseView
from .pie_chart_view import GenderDistributionView
from .box_plot_view import PurchaseBoxPlotView

__all__ = ["AveragePurchaseView", "GenderDistributionView", "PurchaseBoxPlotView"]
