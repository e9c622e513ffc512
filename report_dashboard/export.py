"""CSV export of a rendered report tree."""
import pandas as pd

from report_dashboard.hierarchy import flatten_hierarchy


def report_to_dataframe(nodes, schema) -> pd.DataFrame:
    """Flatten the tree pre-order into one row per node, columns as headers."""
    records = [
        [node.get(col) for col in schema.csv_columns]
        for node in flatten_hierarchy(nodes)
    ]
    return pd.DataFrame(records, columns=list(schema.csv_headers))


def report_to_csv(nodes, schema) -> str:
    return report_to_dataframe(nodes, schema).to_csv(index=False)


def export_filename(schema, report_date) -> str:
    return f"{schema.file_prefix}_{report_date}.csv"
