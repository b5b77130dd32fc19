"""
Sunburst Chart Data

Builds a renderer-agnostic sunburst trace from an analysis result. The
output uses plotly's trace keys (labels, parents, values, ...), so it can
be handed to any plotly front end as-is.

Layout:
    root ("Potential Conditions", value = total score)
      condition nodes (value = score)
        matched symptoms of the top condition (value = 1)
"""

from typing import Any

from symptom_checker.scoring.scoring_types import AnalysisResult

ROOT_LABEL = "Potential Conditions"
ROOT_COLOR = "#f0f0f0"
TOP_COLOR = "#28a745"
OTHER_COLOR = "#d3d3d3"


def build_sunburst(result: AnalysisResult, root_label: str = ROOT_LABEL) -> dict[str, Any]:
    """Build sunburst chart data highlighting the top recommendation."""
    labels = [root_label]
    parents = [""]
    values = [result.total_score]
    hovertext = ["Root node with all potential conditions"]
    colors = [ROOT_COLOR]

    for entry in result.prioritized_conditions:
        labels.append(entry.condition)
        parents.append(root_label)
        values.append(entry.score)
        hovertext.append(f"Condition: {entry.condition}<br>Score: {entry.score}")
        colors.append(TOP_COLOR if entry.condition == result.top_condition else OTHER_COLOR)

    if result.top_condition:
        for symptom in result.matched_symptoms.get(result.top_condition, []):
            labels.append(symptom)
            parents.append(result.top_condition)
            values.append(1)
            hovertext.append(f"Symptom: {symptom}<br>Contributes to {result.top_condition}")
            colors.append(TOP_COLOR)

    return {
        "type": "sunburst",
        "labels": labels,
        "parents": parents,
        "values": values,
        "hovertext": hovertext,
        "hoverinfo": "text+value+percent parent",
        "branchvalues": "total",
        "marker": {"colors": colors, "line": {"width": 2}},
        "sort": False,
    }
