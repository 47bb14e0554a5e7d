"""
MUDTapper session log viewer service.

Repairs, classifies and renders session transcripts, applies the large
file load policy, and serves case-insensitive in-document search and
cross-log search over the log directory.
"""
