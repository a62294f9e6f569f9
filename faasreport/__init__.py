"""faasreport: diagnostic report for OpenFaaS installations on Kubernetes."""

__version__ = "0.1.0"
