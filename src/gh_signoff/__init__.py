"""Mark commits as signed off and require signoff before merging."""
