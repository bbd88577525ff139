"""Components, layout constants, word wrapping, table conversion and the layout engine."""