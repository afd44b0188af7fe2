"""Parsing, vendor prefixing, scoping and minification of component CSS."""