"""Tag selector builders for HTML5 element families."""
