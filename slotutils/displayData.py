import sys

import tabulate

SLOTS_HEADER = ["Date", "Name", "Block", "Pincode", "Vaccine", "AgeLimit", "AvailableCapacity"]
NAME_COLUMN = 1


def displayTable(dict_list):
    """
    This function
        1. Takes a list of dictionary
        2. Add an Index column, and
        3. Displays the data in tabular format
    """
    header = ["idx"] + list(dict_list[0].keys())
    rows = [[idx + 1] + list(x.values()) for idx, x in enumerate(dict_list)]
    print(tabulate.tabulate(rows, header, tablefmt="grid"))


def buildRows(centers):
    """One row per (center, session) pair, in response order."""
    rows = []
    for center in centers:
        for session in center.sessions:
            rows.append(
                [
                    session.date,
                    center.name,
                    center.block_name,
                    center.pincode,
                    session.vaccine,
                    session.min_age_limit,
                    session.available_capacity,
                ]
            )
    return rows


def mergeColumn(rows, column):
    # blank out repeats of the previous row's value so the cell reads as merged
    merged = []
    previous = None
    for idx, row in enumerate(rows):
        row = list(row)
        if idx > 0 and row[column] == previous:
            row[column] = ""
        else:
            previous = row[column]
        merged.append(row)
    return merged


def renderSlotsTable(rows):
    # disable_numparse keeps pincode and capacity text exactly as received
    return tabulate.tabulate(
        mergeColumn(rows, NAME_COLUMN),
        SLOTS_HEADER,
        tablefmt="grid",
        disable_numparse=True,
    )


def displaySlotsTable(centers, file=None):
    print(renderSlotsTable(buildRows(centers)), file=file or sys.stdout)
