from __future__ import annotations


class FakeResponse:
    def __init__(self, status_code=200, text="", headers=None):
        self.status_code = status_code
        self.text = text
        self.headers = headers or {"Content-Type": "application/json"}
        self.encoding = "utf-8"


# structJSON as emitted by the web services, including an 8-digit `\U` escape.
STRUCT_JSON = """{
  "prefixes": {"iron": "http://purl.org/ontology/iron#", "xsd": "http://www.w3.org/2001/XMLSchema#"},
  "resultset": {
    "subject": [
      {
        "uri": "http://techcrunch.com/?p=1081212",
        "type": "ns0:Article",
        "predicate": [
          {"iron:prefLabel": "Microsoft's new bundle"},
          {"cognonto:tag": {"uri": "http://purl.org/ontology/bso#machine-learning",
                            "reify": [{"type": "cognonto:weight", "value": "0.056"}]}},
          {"cognonto:tag": {"uri": "http://purl.org/ontology/bso#data-migration"}},
          {"cognonto:reviewed": {"value": "0", "type": "xsd:integer"}},
          {"cognonto:content": "Emoji \\U0001F600 text"}
        ]
      }
    ]
  }
}"""
