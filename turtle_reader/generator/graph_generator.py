__author__ = 'robert'

import json
import logging
import os

#Placeholder in the html template, replaced by the json element list
DATA_PLACEHOLDER = "##DATA##"

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta content="IE=edge" http-equiv="X-UA-Compatible" />
    <meta content="width=device-width, initial-scale=1.0" name="viewport" />
    <title>Document</title>
    <style>
      #cy {
        width: 100vw;
        height: 100vh;
        display: block;
      }
    </style>
    <script src="https://pagecdn.io/lib/cytoscape/3.20.0/cytoscape.min.js"></script>
  </head>
  <body>
    <div id="cy"></div>

    <script>
      const elements = ##DATA##;
      var cy = cytoscape({
        container: document.getElementById("cy"),
        elements,
        style: [
          {
            selector: "node",
            style: {
              "background-color": "#666",
              label: "data(id)",
            },
          },
          {
            selector: "edge",
            style: {
              width: 3,
              "line-color": "#ccc",
              "target-arrow-color": "#ccc",
              "target-arrow-shape": "triangle",
              "curve-style": "bezier",
              label: "data(name)",
            },
          },
        ],
      });

      var layout = cy.elements().layout({
        name: "circle",
      });

      layout.run();
    </script>
  </body>
</html>
"""


class GraphGenerator:
    """
    Renders triples as a cytoscape.js graph embedded in a html page.
    """

    def generate(self, triples, output_path):
        triples = list(triples)
        logging.info("Got {} triples to visualize".format(len(triples)))
        path = os.path.abspath(output_path)
        logging.info("Writing output to file: {}".format(path))
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render(triples))

    def render(self, triples):
        return HTML_TEMPLATE.replace(DATA_PLACEHOLDER, json.dumps(self.create_elements(triples)))

    def create_elements(self, triples):
        """
        Maps the triples to the data points of the visualization: one node per distinct subject or
        object, followed by one edge per triple. cytoscape expects every point wrapped in a 'data' field.
        :param triples: iterable of Triple
        :return: list of elements
        """
        triples = list(triples)
        nodes = []
        seen = set()
        for triple in triples:
            for value in (triple.subject, triple.object):
                if value not in seen:
                    seen.add(value)
                    nodes.append({"data": {"id": value}})

        edges = [{"data": {"id": "joint-{}".format(i),
                           "source": triple.subject,
                           "target": triple.object,
                           "name": triple.predicate}}
                 for i, triple in enumerate(triples)]
        return nodes + edges
