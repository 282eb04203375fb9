"""Runnable workflow nodes: the node interface, the Log node and the node builder."""