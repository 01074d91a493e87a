from bgp_query.cli import run

run()
