import re

# Permissive URL pattern: optional http(s) scheme, optional www., host, TLD, then path/query.
# http://stackoverflow.com/a/3809435/951517
URI_PATTERN = re.compile(
    r"(https?:)?//(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b([-a-zA-Z0-9@:%_+.~#?&/=]*)",
    re.ASCII,
)
