import csv
import io

from locavote.services.voting.results import RESULT_COLUMNS


def results_to_csv(rows):
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(RESULT_COLUMNS)
    for row in rows:
        writer.writerow(
            ["" if row.get(column) is None else row[column] for column in RESULT_COLUMNS]
        )
    return buffer.getvalue()
