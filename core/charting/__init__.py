"""Chart.js radar configuration building and embedding helpers.

Score series go in, a declarative Chart.js configuration comes out. This
package contains the schema, input normalization, the configuration builder,
and the canvas/`json_script` embedding used by the demo views.
"""
