"""Komendy CLI ocp: każdy moduł udostępnia add_parser(subparsers) i run(args)."""
