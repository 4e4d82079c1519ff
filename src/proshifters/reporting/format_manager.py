class FormatManager:
    def __init__(self, workbook):
        self.workbook = workbook

        # Shift-type header row
        self.header_format = self.create_format({
            "bold": True,
            "align": "center",
            "bottom": 1,
        })

        # Month names, merged across each month's shift columns
        self.grouped_header_format = self.create_format({
            "bold": True,
            "align": "center",
            "valign": "vcenter",
            "text_wrap": False,
            "bg_color": "#D9E1F2",
            "bottom": 1,
        })

        # Staff names
        self.name_cell_format = self.create_format({
            "align": "left",
            "valign": "vcenter",
        })

        # Shift counts
        self.data_cell_format = self.create_format({
            "align": "right",
            "valign": "vcenter",
        })

        # Weekend column stands out from the shift codes after it
        self.highlight_cell_format = self.create_format({
            "align": "right",
            "valign": "vcenter",
            "bg_color": "#FFF59D",
        })

    def create_format(self, properties):
        return self.workbook.add_format(properties)
