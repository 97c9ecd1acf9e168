from .kubernetes_lister import KubernetesPodLister
from .lister import PodLister

__all__ = [
    "KubernetesPodLister",
    "PodLister",
]
