"""
Cluster Builder — connected components of the implicit overlap graph.

Overlap is transitive for grouping: if A overlaps B and B overlaps C then
A, B and C share a cluster even when A and C never touch. Clusters partition
the valid intervals and no interval overlaps anything outside its cluster.

O(n^2) pairwise scan. A day holds tens of meetings, not thousands.
"""

from collections import deque

from briefing_layout.models import Cluster, Interval
from briefing_layout.overlap import layout_order, overlaps


def build_clusters(intervals: list[Interval]) -> list[Cluster]:
    """Partition intervals into maximal overlap-connected clusters, in layout order."""
    ordered = sorted(intervals, key=layout_order)
    visited = [False] * len(ordered)
    clusters: list[Cluster] = []

    for seed in range(len(ordered)):
        if visited[seed]:
            continue
        visited[seed] = True
        queue = deque([seed])
        members: Cluster = []

        while queue:
            idx = queue.popleft()
            members.append(ordered[idx])
            for other in range(len(ordered)):
                if not visited[other] and overlaps(ordered[idx], ordered[other]):
                    visited[other] = True
                    queue.append(other)

        members.sort(key=layout_order)
        clusters.append(members)

    return clusters
