from user_lookup.fetcher import RecordFetcher, make_table

# built once per execution environment, reused by warm invocations
ddb = make_table()
fetcher = RecordFetcher(ddb)

def handler(event, context):
    return fetcher.fetch(event)
