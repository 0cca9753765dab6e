__title__ = "apihttp"
__version__ = "0.5.0"
__author__ = "apihttp contributors"
__license__ = "Apache 2.0"
__copyright__ = "2026 apihttp contributors"
