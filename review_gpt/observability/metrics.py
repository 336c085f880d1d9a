from prometheus_client import REGISTRY, Counter, write_to_textfile


llm_tokens = Counter(
    "llm_tokens_total",
    "Total LLM tokens consumed",
    ["service", "direction"],
)

reviews = Counter(
    "reviews_total",
    "Review requests by outcome",
    ["service", "outcome"],
)


def write_metrics(path: str) -> None:
    """Dump the default registry in the node-exporter textfile format."""
    write_to_textfile(path, REGISTRY)
