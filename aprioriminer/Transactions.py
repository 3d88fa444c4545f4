import pandas as pd


# ############################# loading transactions #############################
def from_data_frame(input_data, market_basket=True):
    """Convert the rows of a data frame into a list of transactions.

    :param
    @input_data - the data frame, one row per transaction
    @market_basket - True: each non-empty cell is an item; False: each column is an attribute, and each cell
        becomes the item "attribute=value"
    """
    transactions = []

    if market_basket:
        for row in input_data.itertuples(index=False):
            transactions.append(tuple(sorted(set(str(value).strip() for value in row if not is_empty(value)))))

    else:
        column_names = input_data.columns.values

        # data without a header only has the column positions as names
        if all(str(name).isdigit() for name in column_names):
            field_names = ['field' + str(column + 1) for column in range(len(column_names))]
        else:
            field_names = [str(name) for name in column_names]

        for row in input_data.itertuples(index=False):
            transactions.append(tuple(sorted(field_names[column] + "=" + str(value)
                                             for column, value in enumerate(row) if not is_empty(value))))

    return transactions


def is_empty(value):
    if isinstance(value, str):
        return value.strip() == ''
    return pd.isna(value)


# a repeatable iterable over a file with one basket per line, which is read again on every traversal
class TransactionFile:
    def __init__(self, path, delimiter=','):
        self.path = path
        self.delimiter = delimiter

    def __iter__(self):
        with open(self.path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                yield tuple(item.strip() for item in line.split(self.delimiter) if item.strip())

    def to_data_frame(self):
        return pd.DataFrame([list(transaction) for transaction in self]).fillna('')
