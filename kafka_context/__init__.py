"""
kafka-context

Manage named connection contexts for Kafka clusters, kubeconfig style:
create and merge profiles, check connectivity before saving, and inspect
broker configuration through the current context.
"""

__version__ = "0.1.0"
__author__ = "kafka-context"
