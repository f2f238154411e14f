import sys, json
from user_lookup.fetcher import Found, NotFound, RecordFetcher, make_table

def main(argv=None, fetcher=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: run_local_lookup.py <userId>", file=sys.stderr)
        return 64
    fetcher = fetcher or RecordFetcher(make_table())

    print(f"🔍 Looking up userId={argv[0]}")
    result = fetcher.lookup({"userId": argv[0]})
    print(json.dumps(result.to_response(), indent=2, default=str))

    if isinstance(result, Found):
        print("✅ Record found")
        return 0
    if isinstance(result, NotFound):
        print("❌ No record for that userId")
        return 1
    print("💥 Lookup failed")
    return 2

if __name__ == "__main__":
    sys.exit(main())
